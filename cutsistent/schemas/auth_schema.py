from marshmallow import Schema, fields, validate

class RegisterSchema(Schema):
    name = fields.Str(load_default="")
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))

class LoginSchema(Schema):
    email = fields.Str(required=True)
    password = fields.Str(required=True)
