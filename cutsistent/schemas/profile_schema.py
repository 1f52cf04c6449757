from marshmallow import Schema, fields, validate

class ProfileUpdateSchema(Schema):
    username = fields.Str(allow_none=True, validate=validate.Regexp(r"^[A-Za-z0-9_.]{3,50}$"))
    display_name = fields.Str(allow_none=True, validate=validate.Length(max=120))
    avatar_url = fields.Str(allow_none=True, validate=validate.Length(max=500))
    bio = fields.Str(allow_none=True, validate=validate.Length(max=500))

    # Nutrition goals
    calorie_goal = fields.Int(validate=validate.Range(min=500, max=10000))
    protein_goal = fields.Int(validate=validate.Range(min=0, max=1000))
    carbs_goal = fields.Int(validate=validate.Range(min=0, max=2000))
    sugar_limit = fields.Float(allow_none=True, validate=validate.Range(min=0, max=500))
