"""
App settings, read from the ``BIKRAM_SAMBAT`` dict in Django settings

    BIKRAM_SAMBAT = {
        'CACHE_ENABLED': True,
        'CACHE_TIMEOUT': 3600,
        'CACHE_PREFIX': 'bs',
    }
"""
from django.conf import settings


DEFAULTS = {
    'CACHE_ENABLED': True,
    'CACHE_TIMEOUT': 3600,
    'CACHE_PREFIX': 'bs',
}


def get_setting(name: str):
    if name not in DEFAULTS:
        raise KeyError(f"Unknown bikram_sambat setting: {name}")
    user_settings = getattr(settings, 'BIKRAM_SAMBAT', {}) or {}
    return user_settings.get(name, DEFAULTS[name])
