"""
API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from app.api.endpoints import auth, health, posts, uploads

api_router = APIRouter()

# Signup / login
api_router.include_router(auth.router)

# Submission, feed, moderation
api_router.include_router(posts.router)

# Pre-signed image uploads
api_router.include_router(uploads.router)

# Health
api_router.include_router(health.router)
