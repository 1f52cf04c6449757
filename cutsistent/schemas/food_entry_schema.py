from marshmallow import Schema, fields, validate

class CreateFoodEntrySchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    calories = fields.Int(load_default=0, validate=validate.Range(min=0))
    protein = fields.Float(load_default=0.0, validate=validate.Range(min=0))
    carbs = fields.Float(load_default=0.0, validate=validate.Range(min=0))
    sugar = fields.Float(load_default=0.0, validate=validate.Range(min=0))
    image_url = fields.Str(allow_none=True)
    logged_at = fields.DateTime(allow_none=True)

class UpdateFoodEntrySchema(Schema):
    name = fields.Str(validate=validate.Length(min=1, max=255))
    calories = fields.Int(validate=validate.Range(min=0))
    protein = fields.Float(validate=validate.Range(min=0))
    carbs = fields.Float(validate=validate.Range(min=0))
    sugar = fields.Float(validate=validate.Range(min=0))
    image_url = fields.Str(allow_none=True)
    logged_at = fields.DateTime()

class ListFoodEntriesQuerySchema(Schema):
    date = fields.Date(allow_none=True, load_default=None)
