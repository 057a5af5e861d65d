from typing import Any


def validated_data(serializer_class, data: Any, **kwargs: Any) -> dict:
    """Run ``serializer_class`` over request data, raising ValidationError on failure."""
    serializer = serializer_class(data=data, **kwargs)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data
