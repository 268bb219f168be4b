"""Protobuf message types exchanged with the Dapr runtime.

Only the messages these helpers decode are declared. They are built from a
descriptor at import time so the package carries no generated ``_pb2`` code.
"""
from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_PACKAGE = "dapr.proto.common.v1"

_TYPE_STRING = descriptor_pb2.FieldDescriptorProto.TYPE_STRING
_TYPE_MESSAGE = descriptor_pb2.FieldDescriptorProto.TYPE_MESSAGE
_LABEL_OPTIONAL = descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL
_LABEL_REPEATED = descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED


def _common_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="dapr/proto/common/v1/common.proto",
        package=_PACKAGE,
        syntax="proto3",
    )

    item = file_proto.message_type.add(name="ConfigurationItem")
    item.field.add(name="value", number=1, type=_TYPE_STRING, label=_LABEL_OPTIONAL)
    item.field.add(name="version", number=2, type=_TYPE_STRING, label=_LABEL_OPTIONAL)
    item.field.add(
        name="metadata",
        number=3,
        type=_TYPE_MESSAGE,
        label=_LABEL_REPEATED,
        type_name=f".{_PACKAGE}.ConfigurationItem.MetadataEntry",
    )

    # map<string, string> is encoded as a repeated nested entry message
    entry = item.nested_type.add(name="MetadataEntry")
    entry.field.add(name="key", number=1, type=_TYPE_STRING, label=_LABEL_OPTIONAL)
    entry.field.add(name="value", number=2, type=_TYPE_STRING, label=_LABEL_OPTIONAL)
    entry.options.map_entry = True
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_common_file().SerializeToString())

ConfigurationItem = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{_PACKAGE}.ConfigurationItem")
)


__all__ = ["ConfigurationItem"]
