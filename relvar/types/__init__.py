# relvar/types/__init__.py
from .fixnum import FixnumSerializer, FixnumType, is_fixnum, serialize_fixnum
from .factory import SERIALIZER_REGISTRY, TYPE_REGISTRY, get_serializer, get_type
from .parts import is_color, is_pno, parts_attributes

__all__ = [
    "FixnumType",
    "FixnumSerializer",
    "is_fixnum",
    "serialize_fixnum",
    "TYPE_REGISTRY",
    "SERIALIZER_REGISTRY",
    "get_type",
    "get_serializer",
    "is_color",
    "is_pno",
    "parts_attributes",
]
