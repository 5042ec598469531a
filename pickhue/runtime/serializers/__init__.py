# Copyright (c) 2026 Pickhue
# SPDX-License-Identifier: MIT

"""
Serializers for ColorReport delivery to the presentation layer.

All serializers preserve the report exactly -- no modification or inference.
"""

from pickhue.runtime.serializers.base import SerializerFormat
from pickhue.runtime.serializers.clipboard import to_copy_formats
from pickhue.runtime.serializers.summary import to_summary

__all__ = [
    "SerializerFormat",
    "to_copy_formats",
    "to_summary",
]
