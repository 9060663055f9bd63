from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

def _norm_email(v):
    return v.strip().lower() if isinstance(v, str) else v

class CredentialsSchema(Schema):
    """email + password body shared by register and update"""
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = _norm_email(data["email"])
        return data

class UserCreateSchema(CredentialsSchema):
    pass

class UserLoginSchema(Schema):
    """login body; no format checks, a wrong pair is answered by the handler"""
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = _norm_email(data["email"])
        return data

class UserUpdateSchema(CredentialsSchema):
    pass

class UserOutSchema(Schema):
    id = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
    email = fields.String()
    is_chirpy_red = fields.Boolean()

class LoginOutSchema(UserOutSchema):
    token = fields.String()
    refresh_token = fields.String()

class TokenOutSchema(Schema):
    token = fields.String()
