# -*- coding: utf-8 -*-
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
User profile sub-models, mirroring the LoginRadius JSON schema.

Field names follow Python conventions; JSON_FIELDS maps them to the
property names used on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Any, Optional


def _lookup(data: Dict[str, Any], key: str) -> Any:
    """Case-insensitive dict lookup, the API is not consistent about casing"""
    if key in data:
        return data[key]
    key_lower = key.lower()
    for k, v in data.items():
        if isinstance(k, str) and k.lower() == key_lower:
            return v
    return None


class _WireModel:

    JSON_FIELDS: Dict[str, str] = {}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        data = data or {}
        kwargs = {
            f.name: _lookup(data, cls.JSON_FIELDS.get(f.name, f.name))
            for f in fields(cls)
        }
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[self.JSON_FIELDS.get(f.name, f.name)] = value
        return result


@dataclass
class LoginRadiusLanguage(_WireModel):

    JSON_FIELDS = {"id": "Id", "name": "Name", "proficiency": "proficiency"}

    id: Optional[str] = None
    name: Optional[str] = None
    proficiency: Optional[str] = None


@dataclass
class RemoveLanguage(LoginRadiusLanguage):
    """Language entry of a profile update; op carries the patch operation"""

    JSON_FIELDS = {**LoginRadiusLanguage.JSON_FIELDS, "op": "op"}

    op: Optional[str] = None


@dataclass
class PostResponse(_WireModel):
    """Answer of the profile update calls; data is the updated profile"""

    JSON_FIELDS = {"is_posted": "IsPosted", "data": "Data"}

    # Kept exactly as sent; the schema declares a string, no coercion to bool
    is_posted: Optional[Any] = None
    data: Optional[Dict[str, Any]] = None


__all__ = ["LoginRadiusLanguage", "RemoveLanguage", "PostResponse"]
