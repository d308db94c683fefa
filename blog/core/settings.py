from dotenv import load_dotenv
import os

load_dotenv()

PROJECT_NAME = os.environ.get('PROJECT_NAME', 'Blog API')

# Security settings
DEFAULT_SECRET_KEY = 'YourSuperSecretKeyThatShouldBeAtLeast32CharactersLong'
SECRET_KEY = os.environ.get('SECRET_KEY', DEFAULT_SECRET_KEY)
JWT_ALGORITHM = os.environ.get('JWT_ALGORITHM', 'HS256')
JWT_ISSUER = os.environ.get('JWT_ISSUER', 'BlogApi')
JWT_AUDIENCE = os.environ.get('JWT_AUDIENCE', 'BlogApp')
ACCESS_TOKEN_EXPIRE_DAYS = int(os.environ.get('ACCESS_TOKEN_EXPIRE_DAYS', '7'))

# Logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

# Populate the in-memory store with demo users, posts and likes on startup
SEED_SAMPLE_DATA = os.environ.get('SEED_SAMPLE_DATA', 'true').lower() in {'1', 'true', 'yes'}

CORS_ORIGINS = [origin.strip() for origin in os.environ.get('CORS_ORIGINS', '*').split(',')]
