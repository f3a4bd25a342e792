import json
import logging

from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET

from .catalog import suggest
from .exceptions import ProductNameError, UpstreamFailure
from .presentation import ERROR_DISMISS_SECONDS, result_panels
from .services import analyze_product
from .validation import client_rules, validate_product_name

# Get the logger we defined in settings
logger = logging.getLogger('safety')

GENERIC_ERROR = "Unable to analyze product at the moment. Please try again later."


@require_GET
def health(request):
    return JsonResponse({"status": "ok", "message": "Chemical Safety Hub API is running"})


@require_GET
def product_suggestions_api(request):
    return JsonResponse({"suggestions": suggest(request.GET.get('q', ''))})


@csrf_exempt
def analyze_product_api(request):
    if request.method != 'POST':
        return JsonResponse({"error": "POST only"}, status=405)

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError:
        return JsonResponse({"error": "Invalid JSON format"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"error": "Invalid JSON format"}, status=400)

    try:
        product_name = validate_product_name(data.get('productName'))
    except ProductNameError as e:
        return JsonResponse({"error": e.message}, status=400)

    try:
        result = analyze_product(product_name)
        return JsonResponse({"success": True, "data": result.model_dump()})

    except UpstreamFailure as e:
        logger.error(f"Error in /analyze: {str(e)}")
        return JsonResponse({"error": GENERIC_ERROR}, status=500)

    except Exception as e:
        logger.exception(f"Unexpected Error in /analyze: {str(e)}")
        return JsonResponse({"error": GENERIC_ERROR}, status=500)


def search_page(request):
    """
    Search page. A plain form POST runs the same analysis and renders the
    results server-side; the script on the page adds autocomplete.
    """
    context = {
        "product_name": "",
        "panels": None,
        "error": None,
        "rules": client_rules(),
        "error_dismiss_ms": ERROR_DISMISS_SECONDS * 1000,
    }

    if request.method == 'POST':
        raw_name = request.POST.get('productName', '')
        context["product_name"] = raw_name
        try:
            product_name = validate_product_name(raw_name)
            result = analyze_product(product_name)
            context["panels"] = result_panels(result)
        except ProductNameError as e:
            context["error"] = e.message
        except UpstreamFailure as e:
            logger.error(f"Error in search page: {str(e)}")
            context["error"] = GENERIC_ERROR
        except Exception as e:
            logger.exception(f"Unexpected Error in search page: {str(e)}")
            context["error"] = GENERIC_ERROR

    return render(request, 'safety/index.html', context)
