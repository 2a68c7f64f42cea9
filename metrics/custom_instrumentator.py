from prometheus_fastapi_instrumentator import Instrumentator


def build_instrumentator() -> Instrumentator:
    return Instrumentator(
        should_ignore_untemplated=True,      # /users/123 -> /users/{user_id}
        excluded_handlers=["/metrics"],      # exclude metrics endpoint from instrumentation
        should_instrument_requests_inprogress=True,
        should_group_status_codes=False,
    )
