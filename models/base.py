"""
Database Base Module

Creates the SQLAlchemy database instance that all models inherit from.
This is separate to avoid circular imports.
"""

from flask_sqlalchemy import SQLAlchemy

# Create the SQLAlchemy instance
# Bound to the Flask app in create_app(); tables come from migrations, not create_all()
db = SQLAlchemy()
