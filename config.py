import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///ckd_predictions.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Record store: 'memory' (lost on restart) or 'database' (SQLAlchemy)
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'memory').lower()

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Comma separated, "*" allows every origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    STORAGE_BACKEND = 'memory'
    LOG_LEVEL = 'WARNING'
