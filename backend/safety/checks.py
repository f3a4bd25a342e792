from django.conf import settings
from django.core.checks import Error, register


@register()
def gemini_api_key_check(app_configs, **kwargs):
    if getattr(settings, 'GEMINI_API_KEY', ''):
        return []
    return [
        Error(
            'GEMINI_API_KEY is not set in environment variables',
            hint='Add GEMINI_API_KEY to backend/.env or the process environment.',
            id='safety.E001',
        )
    ]
