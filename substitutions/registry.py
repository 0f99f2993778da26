# Placeholder name -> generator lookup used by the template filler

import threading
import uuid
from datetime import datetime, timezone
from types import MappingProxyType

from faker import Faker


_local = threading.local()


def faker():
    """Faker instance owned by the calling thread.

    Sessions run on their own threads, so each one draws from a private
    random source instead of sharing a single generator.
    """

    fake = getattr(_local, "faker", None)

    if fake is None:
        fake = Faker("en_US")
        # own random.Random instead of Faker's module-wide one
        fake.seed_instance()
        _local.faker = fake

    return fake


# ---------------- Generators ----------------

def gen_address():
    return faker().street_address()


def gen_boolean():
    return str(faker().pybool()).lower()


def gen_city():
    return faker().city()


def gen_color():
    return faker().hex_color()


def gen_credit_card():
    return faker().credit_card_number()


def gen_datetime():
    return datetime.now(timezone.utc).isoformat()


def gen_email():
    return faker().safe_email()


def gen_ipv4():
    return faker().ipv4_public()


def gen_name():
    return faker().name()


def gen_number():
    # three digits, leading digit never zero
    return faker().numerify("%##")


def gen_paragraph():
    return faker().paragraph()


def gen_phone():
    return faker().phone_number()


def gen_uuid():
    return str(uuid.uuid4())


def gen_words():
    return " ".join(faker().words())


def gen_zip():
    return faker().postcode()


# Built once at import, read-only afterwards
SUBSTITUTIONS = MappingProxyType({
    "address": gen_address,
    "boolean": gen_boolean,
    "city": gen_city,
    "color": gen_color,
    "credit_card": gen_credit_card,
    "datetime": gen_datetime,
    "email": gen_email,
    "ipv4": gen_ipv4,
    "name": gen_name,
    "number": gen_number,
    "paragraph": gen_paragraph,
    "phone": gen_phone,
    "uuid": gen_uuid,
    "words": gen_words,
    "zip": gen_zip,
})


def lookup(key):
    return SUBSTITUTIONS.get(key)


def keys():
    return sorted(SUBSTITUTIONS)
