from selectorkit.objects.serialization import from_json, get_json
from selectorkit.objects.shapes import Rectangle

__all__ = ["Rectangle", "get_json", "from_json"]
