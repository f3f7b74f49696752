"""Sample synthesis exports."""

from .payload_sampler import (
    GENERIC_SAMPLE_KEY,
    MODEL_OBJECT_SAMPLE_KEY,
    QNAME_PREFIX,
    build_example_output,
    build_request_body,
    map_sample_key,
    shallow_sample,
    synthesize_sample,
)

__all__ = [
    "GENERIC_SAMPLE_KEY",
    "MODEL_OBJECT_SAMPLE_KEY",
    "QNAME_PREFIX",
    "build_example_output",
    "build_request_body",
    "map_sample_key",
    "shallow_sample",
    "synthesize_sample",
]
