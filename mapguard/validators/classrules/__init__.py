"""Class-level mapping constraints."""

from mapguard.validators.classrules.contains_embedded_with_id import ContainsEmbeddedWithId
from mapguard.validators.classrules.duplicated_attribute_names import DuplicatedAttributeNames
from mapguard.validators.classrules.embedded_and_id import EmbeddedAndId
from mapguard.validators.classrules.entity_and_embed import EntityAndEmbed
from mapguard.validators.classrules.entity_cannot_be_map_or_iterable import EntityCannotBeMapOrIterable
from mapguard.validators.classrules.multiple_id import MultipleId
from mapguard.validators.classrules.multiple_versions import MultipleVersions
from mapguard.validators.classrules.must_have_no_arg_constructor import MustHaveNoArgConstructor
from mapguard.validators.classrules.no_id import NoId

__all__ = [
    "ContainsEmbeddedWithId",
    "DuplicatedAttributeNames",
    "EmbeddedAndId",
    "EntityAndEmbed",
    "EntityCannotBeMapOrIterable",
    "MultipleId",
    "MultipleVersions",
    "MustHaveNoArgConstructor",
    "NoId",
]
