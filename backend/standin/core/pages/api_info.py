"""API Info: fixed JSON description of the API surface.

Invariants:
    - No runtime-derived values; output is byte-identical across calls
"""

from standin.schemas.payloads import ApiInfo


def render_api_info() -> str:
    return ApiInfo().model_dump_json(indent=2)
