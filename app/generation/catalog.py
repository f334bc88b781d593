"""Field-type catalog.

One ordered table maps every field-type tag to the Faker call that produces
its value, the JSON kind of that value, and whether its natural length must
be kept when uniform field lengths are requested. Record assembly cycles
through ``FIELD_TYPES`` in this order, so the order is part of the output
format and must not change.

Relative dates are computed from an ``anchor`` datetime rather than the wall
clock so that a page regenerated later in the same session is identical.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Dict, List

from faker import Faker

NANOID_ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
VIN_ALPHABET = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"
LICENSE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

GENDERS = ["Male", "Female", "Non-binary", "Agender", "Genderqueer", "Two-spirit"]
DEPARTMENTS = [
    "Automotive", "Baby", "Beauty", "Books", "Clothing", "Computers", "Electronics",
    "Games", "Garden", "Grocery", "Health", "Home", "Industrial", "Jewelery",
    "Kids", "Movies", "Music", "Outdoors", "Shoes", "Sports", "Tools", "Toys",
]
PRODUCT_ADJECTIVES = [
    "Awesome", "Elegant", "Ergonomic", "Fantastic", "Generic", "Gorgeous",
    "Handcrafted", "Handmade", "Incredible", "Intelligent", "Licensed",
    "Modern", "Practical", "Refined", "Rustic", "Sleek", "Small", "Tasty",
]
PRODUCT_MATERIALS = [
    "Bamboo", "Bronze", "Ceramic", "Concrete", "Cotton", "Fresh", "Frozen",
    "Granite", "Metal", "Plastic", "Rubber", "Silk", "Soft", "Steel", "Wooden",
]
PRODUCTS = [
    "Bacon", "Ball", "Bike", "Car", "Chair", "Cheese", "Chicken", "Chips",
    "Computer", "Fish", "Gloves", "Hat", "Keyboard", "Mouse", "Pants", "Pizza",
    "Salad", "Sausages", "Shirt", "Shoes", "Soap", "Table", "Towels", "Tuna",
]
TRANSACTION_TYPES = ["deposit", "withdrawal", "payment", "invoice"]
VEHICLE_MANUFACTURERS = [
    "Audi", "BMW", "Chevrolet", "Ford", "Honda", "Hyundai", "Kia", "Mazda",
    "Mercedes Benz", "Nissan", "Subaru", "Tesla", "Toyota", "Volkswagen", "Volvo",
]
VEHICLE_MODELS = [
    "Accord", "Camry", "Civic", "Corolla", "Escalade", "Explorer", "F-150",
    "Golf", "Model S", "Mustang", "Outback", "Prius", "Wrangler", "XC90",
]
VEHICLE_TYPES = [
    "Cargo Van", "Convertible", "Coupe", "Crew Cab Pickup", "Extended Cab Pickup",
    "Hatchback", "Minivan", "Passenger Van", "SUV", "Sedan", "Wagon",
]
VEHICLE_FUELS = ["Diesel", "Electric", "Gasoline", "Hybrid"]
PROTOCOLS = ["http", "https"]


class ValueKind(str, Enum):
    """JSON kind of a generated value."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldType:
    """One catalog entry."""

    tag: str
    generate: Callable[[Faker, datetime], Any]
    kind: ValueKind = ValueKind.STRING
    preserve_length: bool = False

    @property
    def is_string(self) -> bool:
        return self.kind == ValueKind.STRING

    @property
    def normalizable(self) -> bool:
        """Whether uniform-length mode may pad or truncate this field."""
        return self.is_string and not self.preserve_length


def _day(anchor: datetime, days: int):
    return (anchor + timedelta(days=days)).date()


def _birth_date(fake: Faker, anchor: datetime) -> str:
    start = _day(anchor, -80 * 365)
    end = _day(anchor, -18 * 365)
    return fake.date_between_dates(date_start=start, date_end=end).isoformat()


def _recent_datetime(fake: Faker, anchor: datetime) -> str:
    value = fake.date_time_between_dates(
        datetime_start=anchor - timedelta(days=1), datetime_end=anchor
    )
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def _semver(fake: Faker, anchor: datetime) -> str:
    return ".".join(str(fake.random_int(0, 9)) for _ in range(3))


def _product_name(fake: Faker, anchor: datetime) -> str:
    return " ".join(
        (
            fake.random_element(PRODUCT_ADJECTIVES),
            fake.random_element(PRODUCT_MATERIALS),
            fake.random_element(PRODUCTS),
        )
    )


def _directory_path(fake: Faker, anchor: datetime) -> str:
    return "/" + "/".join(fake.words(nb=fake.random_int(1, 4)))


def _license_number(fake: Faker, anchor: datetime) -> str:
    return fake.lexify("?" * fake.random_int(8, 12), letters=LICENSE_ALPHABET)


FIELD_TYPES: List[FieldType] = [
    # Unique identifier, always first
    FieldType("uuid", lambda f, a: f.uuid4(), preserve_length=True),
    # Personal information
    FieldType("firstName", lambda f, a: f.first_name()),
    FieldType("lastName", lambda f, a: f.last_name()),
    FieldType("fullName", lambda f, a: f.name()),
    FieldType("middleName", lambda f, a: f.first_name()),
    FieldType("gender", lambda f, a: f.random_element(GENDERS)),
    FieldType("birthDate", _birth_date),
    FieldType("age", lambda f, a: f.random_int(18, 85), ValueKind.INTEGER),
    FieldType("bio", lambda f, a: f.sentence(nb_words=8)),
    FieldType("jobTitle", lambda f, a: f.job()),
    FieldType("suffix", lambda f, a: f.suffix()),
    FieldType("prefix", lambda f, a: f.prefix()),
    FieldType("phone", lambda f, a: f.phone_number()),
    FieldType("phoneNumber", lambda f, a: f.phone_number()),
    # Location & address
    FieldType("address", lambda f, a: f.street_address()),
    FieldType("streetName", lambda f, a: f.street_name()),
    FieldType("buildingNumber", lambda f, a: f.building_number()),
    FieldType("city", lambda f, a: f.city()),
    FieldType("state", lambda f, a: f.state()),
    FieldType("country", lambda f, a: f.country()),
    FieldType("zipCode", lambda f, a: f.postcode()),
    FieldType("latitude", lambda f, a: float(f.latitude()), ValueKind.FLOAT),
    FieldType("longitude", lambda f, a: float(f.longitude()), ValueKind.FLOAT),
    FieldType("timezone", lambda f, a: f.timezone()),
    # Business & finance
    FieldType("company", lambda f, a: f.company()),
    FieldType("department", lambda f, a: f.random_element(DEPARTMENTS)),
    FieldType("catchPhrase", lambda f, a: f.catch_phrase()),
    FieldType("buzzword", lambda f, a: f.bs()),
    FieldType("salary", lambda f, a: f.random_int(30000, 200000), ValueKind.INTEGER),
    FieldType("accountNumber", lambda f, a: f.numerify("########")),
    FieldType("routingNumber", lambda f, a: f.aba()),
    FieldType("creditCard", lambda f, a: f.credit_card_number()),
    FieldType("currency", lambda f, a: f.currency_code()),
    FieldType("price", lambda f, a: round(f.random.uniform(1, 1000), 2), ValueKind.FLOAT),
    FieldType("transactionType", lambda f, a: f.random_element(TRANSACTION_TYPES)),
    FieldType("bitcoinAddress", lambda f, a: "1" + f.lexify("?" * 33, letters=BASE58_ALPHABET)),
    FieldType("bankName", lambda f, a: f.company() + " Bank"),
    FieldType("iban", lambda f, a: f.iban()),
    # Internet & technology
    FieldType("email", lambda f, a: f.email()),
    FieldType("website", lambda f, a: f.url()),
    FieldType("username", lambda f, a: f.user_name()),
    FieldType("password", lambda f, a: f.password(length=12)),
    FieldType("domainName", lambda f, a: f.domain_name()),
    FieldType("ip", lambda f, a: f.ipv4()),
    FieldType("ipv6", lambda f, a: f.ipv6()),
    FieldType("mac", lambda f, a: f.mac_address()),
    FieldType("userAgent", lambda f, a: f.user_agent()),
    FieldType("protocol", lambda f, a: f.random_element(PROTOCOLS)),
    FieldType("port", lambda f, a: f.port_number(), ValueKind.INTEGER),
    FieldType("emoji", lambda f, a: f.emoji()),
    # Commerce & products
    FieldType("productName", _product_name),
    FieldType("productDescription", lambda f, a: f.sentence(nb_words=14)),
    FieldType("productMaterial", lambda f, a: f.random_element(PRODUCT_MATERIALS)),
    FieldType("productAdjective", lambda f, a: f.random_element(PRODUCT_ADJECTIVES)),
    FieldType("rating", lambda f, a: round(f.random.uniform(1, 5), 1), ValueKind.FLOAT),
    FieldType("isbn", lambda f, a: f.isbn10()),
    FieldType("ean", lambda f, a: f.ean13()),
    FieldType("productCategory", lambda f, a: f.random_element(DEPARTMENTS)),
    # Vehicle & transportation
    FieldType(
        "vehicle",
        lambda f, a: f"{f.random_element(VEHICLE_MANUFACTURERS)} {f.random_element(VEHICLE_MODELS)}",
    ),
    FieldType("vehicleModel", lambda f, a: f.random_element(VEHICLE_MODELS)),
    FieldType("vehicleManufacturer", lambda f, a: f.random_element(VEHICLE_MANUFACTURERS)),
    FieldType("vehicleType", lambda f, a: f.random_element(VEHICLE_TYPES)),
    FieldType("vehicleFuel", lambda f, a: f.random_element(VEHICLE_FUELS)),
    FieldType("vin", lambda f, a: f.lexify("?" * 17, letters=VIN_ALPHABET)),
    # System & files
    FieldType("fileName", lambda f, a: f.file_name()),
    FieldType("fileExtension", lambda f, a: f.file_extension()),
    FieldType("mimeType", lambda f, a: f.mime_type()),
    FieldType("directoryPath", _directory_path),
    FieldType("semver", _semver),
    # Dates & time
    FieldType("date", _recent_datetime),
    FieldType(
        "recentDate",
        lambda f, a: f.date_between_dates(_day(a, -30), a.date()).isoformat(),
    ),
    FieldType(
        "futureDate",
        lambda f, a: f.date_between_dates(_day(a, 1), _day(a, 365)).isoformat(),
    ),
    FieldType("weekday", lambda f, a: f.day_of_week()),
    FieldType("month", lambda f, a: f.month_name()),
    # Text & content
    FieldType("description", lambda f, a: f.sentence(nb_words=10)),
    FieldType("sentence", lambda f, a: f.sentence()),
    FieldType("paragraph", lambda f, a: f.paragraph()),
    FieldType("words", lambda f, a: " ".join(f.words(nb=3))),
    FieldType("slug", lambda f, a: f.slug()),
    FieldType("title", lambda f, a: f.sentence(nb_words=5).rstrip(".")),
    # Identification & codes
    FieldType(
        "nanoid", lambda f, a: f.lexify("?" * 21, letters=NANOID_ALPHABET), preserve_length=True
    ),
    FieldType("color", lambda f, a: f.color_name()),
    FieldType("hexColor", lambda f, a: f.hex_color()),
    FieldType("number", lambda f, a: f.random_int(1, 10000), ValueKind.INTEGER),
    FieldType("boolean", lambda f, a: f.boolean(), ValueKind.BOOLEAN),
    FieldType("imei", lambda f, a: f.numerify("#" * 15)),
    FieldType("creditCardCVV", lambda f, a: f.credit_card_security_code()),
    FieldType("licenseNumber", _license_number),
]

CATALOG: Dict[str, FieldType] = {field.tag: field for field in FIELD_TYPES}
FIELD_TAGS: List[str] = [field.tag for field in FIELD_TYPES]


def field_type_at(index: int) -> FieldType:
    """Catalog entry for the ``index``-th field of an object (0-based, cyclic)."""
    return FIELD_TYPES[index % len(FIELD_TYPES)]


def field_name(tag: str, ordinal: int) -> str:
    return f"{tag}_{ordinal}"


def tag_from_field_name(name: str) -> str:
    """Recover the type tag from a ``{tag}_{ordinal}`` field name."""
    return name.rsplit("_", 1)[0]


__all__ = [
    "ValueKind",
    "FieldType",
    "FIELD_TYPES",
    "FIELD_TAGS",
    "CATALOG",
    "field_type_at",
    "field_name",
    "tag_from_field_name",
]
