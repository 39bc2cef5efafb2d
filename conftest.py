import os

# Set before any test module imports api.security / services.credential_store
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MESSAGELY_LISTING_POLICY", "open")
