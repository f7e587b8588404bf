"""
Amount Words Routes Package
API route blueprints.
"""

from amount_words.routes.convert import convert_bp
from amount_words.routes.health import health_bp

__all__ = ['convert_bp', 'health_bp']
