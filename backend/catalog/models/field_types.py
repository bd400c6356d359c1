# File: catalog/models/field_types.py
import enum


class BaseType(str, enum.Enum):
    """Storage-level type of a Field."""
    BigIntegerField = "BigIntegerField"
    BooleanField = "BooleanField"
    CharField = "CharField"
    DateField = "DateField"
    DateTimeField = "DateTimeField"
    DecimalField = "DecimalField"
    DictionaryField = "DictionaryField"
    FloatField = "FloatField"
    IntegerField = "IntegerField"
    TextField = "TextField"
    TimeField = "TimeField"
    UnknownField = "UnknownField"


class SpecialType(str, enum.Enum):
    """Semantic tag refining how a Field's values are interpreted."""
    avatar = "avatar"
    category = "category"
    city = "city"
    country = "country"
    desc = "desc"
    fk = "fk"
    id = "id"
    image = "image"
    json = "json"
    latitude = "latitude"
    longitude = "longitude"
    name = "name"
    number = "number"
    state = "state"
    timestamp_milliseconds = "timestamp_milliseconds"
    timestamp_seconds = "timestamp_seconds"
    url = "url"
    zip_code = "zip_code"


class FieldType(str, enum.Enum):
    metric = "metric"        # A number that can be added, graphed, etc.
    dimension = "dimension"  # A high or low-cardinality value meant to be used as a grouping
    info = "info"            # Non-numerical value that is not meant to be used
    sensitive = "sensitive"  # A Field that should never be shown anywhere


# User-facing names for the special types
SPECIAL_TYPE_NAMES = {
    SpecialType.avatar: "Avatar Image URL",
    SpecialType.category: "Category",
    SpecialType.city: "City",
    SpecialType.country: "Country",
    SpecialType.desc: "Description",
    SpecialType.fk: "Foreign Key",
    SpecialType.id: "Entity Key",
    SpecialType.image: "Image URL",
    SpecialType.json: "Field containing JSON",
    SpecialType.latitude: "Latitude",
    SpecialType.longitude: "Longitude",
    SpecialType.name: "Entity Name",
    SpecialType.number: "Number",
    SpecialType.state: "State",
    SpecialType.timestamp_milliseconds: "Timestamp - milliseconds since 1970",
    SpecialType.timestamp_seconds: "Timestamp - seconds since 1970",
    SpecialType.url: "URL",
    SpecialType.zip_code: "Zip Code",
}


class FKRelationship(str, enum.Enum):
    many_to_one = "Mt1"
    one_to_one = "1t1"
    many_to_many = "MtM"
