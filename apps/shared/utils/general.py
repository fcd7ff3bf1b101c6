from django.utils import timezone


def utc_now_sec() -> int:
    """Current Unix timestamp in whole seconds"""
    return int(timezone.now().timestamp())
