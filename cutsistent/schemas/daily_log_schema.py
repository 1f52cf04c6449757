from marshmallow import Schema, fields, validate

class HistoryQuerySchema(Schema):
    range = fields.Str(load_default="week", validate=validate.OneOf(["week", "month"]))
