from marshmallow import Schema, fields


class ChirpCreateSchema(Schema):
    # max length is enforced by the endpoint so it can answer 400
    body = fields.String(required=True)


class ChirpOutSchema(Schema):
    id = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
    body = fields.String()
    user_id = fields.String()
