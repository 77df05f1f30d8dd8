"""Classify services."""

from ecosort.application.classify.services.instruction_builder import (
    build_instruction,
    render_preamble,
)
from ecosort.application.classify.services.oracle_gateway import OracleGateway
from ecosort.application.classify.services.reply_parser import (
    OracleReply,
    load_json_object,
    parse_reply,
)

__all__ = [
    "OracleGateway",
    "OracleReply",
    "build_instruction",
    "load_json_object",
    "parse_reply",
    "render_preamble",
]
