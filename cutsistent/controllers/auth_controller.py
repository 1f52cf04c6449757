from sqlalchemy.exc import SQLAlchemyError
from cutsistent.extensions import db
from cutsistent.models.user import User
from cutsistent.schemas.auth_schema import LoginSchema, RegisterSchema
from cutsistent.services.profile_service import create_profile
from cutsistent.utils.auth import create_token, check_password_hash, hash_password
from cutsistent.utils.http import ok, error, json_body, validate_schema


def _user_payload(user: User):
    return {"id": user.id, "name": user.name, "email": user.email}


def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400, details=errors)

    email = data["email"].strip().lower()
    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, data["password"]):
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    return ok({"token": create_token(user.id), "user": _user_payload(user)})

def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid registration data", 400, details=errors)

    email = data["email"].strip().lower()
    if User.query.filter_by(email=email).first():
        return error("EMAIL_IN_USE", "email already registered", 409)
    try:
        user = User(name=data["name"].strip(), email=email, password=hash_password(data["password"]))
        db.session.add(user)
        db.session.flush()
        create_profile(user)
        db.session.commit()
        return ok({"token": create_token(user.id), "user": _user_payload(user)}, 201)
    except SQLAlchemyError as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

def logout_handler():
    """
    JWTs are dropped client-side; this endpoint only confirms the logout.
    """
    return ok({"message": "Logged out successfully"})
