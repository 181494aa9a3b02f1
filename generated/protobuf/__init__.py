# Generated by glide-protogen. DO NOT EDIT.
"""Python bindings for the client wire protocol schemas."""

from . import command_request_pb2
from . import connection_request_pb2
from . import response_pb2
from ._buffers import parse, payload_view

__all__ = [
    "command_request_pb2",
    "connection_request_pb2",
    "response_pb2",
    "parse",
    "payload_view",
]
