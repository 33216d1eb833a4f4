# recruitment_portal/db/seed.py
import random
from datetime import date

from faker import Faker
from tqdm import tqdm

from recruitment_portal.main import Portal, lifespan
from recruitment_portal.schemas.enums import Governorate, RequestType
from recruitment_portal.schemas.user_schema import User
from recruitment_portal.services.national_id import build_national_id

fake = Faker()

NUM_USERS = 25
MAX_REQUESTS_PER_USER = 3
DEMO_PASSWORD = "recruit123"
MIN_SEED_AGE = 19
MAX_SEED_AGE = 34


def random_birth_date(today: date) -> date:
    age = random.randint(MIN_SEED_AGE, MAX_SEED_AGE)
    # day capped at 28 so every month is valid
    return date(today.year - age, random.randint(1, 12), random.randint(1, 28))


def random_phone() -> str:
    return f"01{random.choice('0125')}{random.randint(0, 99_999_999):08d}"


def registration_form(today: date, serial: int) -> dict:
    birth = random_birth_date(today)
    national_id = build_national_id(
        birth.year,
        birth.month,
        birth.day,
        random.choice(list(Governorate)),
        serial=serial,
        check_digit=random.randint(0, 9),
    )
    return {
        "full_name": f"{fake.first_name_male()} {fake.last_name()}",
        "national_id": national_id,
        "address": f"{fake.street_address()}, {fake.city()}",
        "phone": random_phone(),
        "email": fake.unique.email(),
        "password": DEMO_PASSWORD,
        "confirm_password": DEMO_PASSWORD,
    }


def seed(portal: Portal, num_users: int = NUM_USERS, seed_value: int | None = None) -> list[User]:
    if seed_value is not None:
        Faker.seed(seed_value)
        random.seed(seed_value)

    today = portal.accounts.clock().date()
    users = []

    for serial in tqdm(range(num_users), desc="Registering users"):
        user = portal.accounts.register(registration_form(today, serial))
        users.append(user)

        session = portal.accounts.login(user.national_id, DEMO_PASSWORD)
        for _ in range(random.randint(0, MAX_REQUESTS_PER_USER)):
            portal.requests.submit(session, {
                "request_type": random.choice(list(RequestType)).value,
                "requested_governorate": random.choice(list(Governorate)).label,
                "message": fake.sentence(nb_words=6),
                "uploaded_file_name": fake.file_name(extension="pdf"),
            })

    portal.accounts.logout()
    return users


if __name__ == "__main__":
    with lifespan() as portal:
        created = seed(portal)
        print(f"Seeded {len(created)} users. Demo password: {DEMO_PASSWORD}")
