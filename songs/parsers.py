from rest_framework.parsers import JSONParser


class AnyContentTypeJSONParser(JSONParser):
    """Reads the body as JSON whatever Content-Type the caller sent (e.g. ``curl -d``)."""

    media_type = "*/*"
