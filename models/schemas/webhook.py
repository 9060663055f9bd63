from marshmallow import EXCLUDE, Schema, fields


class WebhookDataSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    # parsed as a UUID by the endpoint so a bad id answers 400
    user_id = fields.String(load_default=None, allow_none=True)


class PolkaWebhookSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    event = fields.String(load_default="")
    data = fields.Nested(WebhookDataSchema, load_default=dict)
