"""Shared failure code constants for quest import error handling."""

PARSE_FAILURE = "parse_failure"
EMPTY_PAYLOAD = "empty_payload"
INVALID_RECORD_SHAPE = "invalid_record_shape"
STORE_REJECTION = "store_rejection"
