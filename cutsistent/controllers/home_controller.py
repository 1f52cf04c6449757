from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from cutsistent.extensions import db

def home_index():
    return jsonify({
        "message": "Cutsistent API",
    })

def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text('SELECT 1'))
    except SQLAlchemyError as e:
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
