"""
Bundled advocate dataset.

Used two ways: the seed script inserts it into the database, and the
search layer serves it in process when the database is unavailable.
"""

from typing import List

from app.schemas.advocate import AdvocateCreate, AdvocateRead

SPECIALTIES = [
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, grief)",
    "Men's issues",
    "Relationship Issues (family, couples)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
]


def _pick(*indexes: int) -> List[str]:
    return [SPECIALTIES[i] for i in indexes]


ADVOCATE_SEED = [
    dict(first_name="John", last_name="Doe", city="New York", degree="MD",
         specialties=_pick(0, 4, 7), years_of_experience=10, phone_number="5551234567"),
    dict(first_name="Jane", last_name="Smith", city="Los Angeles", degree="PhD",
         specialties=_pick(1, 6, 9), years_of_experience=8, phone_number="5559876543"),
    dict(first_name="Alice", last_name="Johnson", city="Chicago", degree="MSW",
         specialties=_pick(4, 8), years_of_experience=5, phone_number="5554567890"),
    dict(first_name="Michael", last_name="Brown", city="Houston", degree="MD",
         specialties=_pick(2, 10, 13), years_of_experience=12, phone_number="5556543210"),
    dict(first_name="Emily", last_name="Davis", city="Phoenix", degree="PhD",
         specialties=_pick(11, 20, 21), years_of_experience=7, phone_number="5553210987"),
    dict(first_name="Chris", last_name="Martinez", city="Philadelphia", degree="MSW",
         specialties=_pick(5, 6), years_of_experience=9, phone_number="5557890123"),
    dict(first_name="Jessica", last_name="Taylor", city="San Antonio", degree="MD",
         specialties=_pick(12, 14, 16), years_of_experience=11, phone_number="5554561234"),
    dict(first_name="David", last_name="Harris", city="San Diego", degree="PhD",
         specialties=_pick(17, 18), years_of_experience=6, phone_number="5557896543"),
    dict(first_name="Laura", last_name="Clark", city="Dallas", degree="MSW",
         specialties=_pick(15, 19, 22), years_of_experience=4, phone_number="5550123456"),
    dict(first_name="Daniel", last_name="Lewis", city="San Jose", degree="MD",
         specialties=_pick(3, 23), years_of_experience=13, phone_number="5553217654"),
    dict(first_name="Sarah", last_name="Lee", city="Austin", degree="PhD",
         specialties=_pick(24, 20), years_of_experience=10, phone_number="5551238765"),
    dict(first_name="James", last_name="King", city="Jacksonville", degree="MSW",
         specialties=_pick(25, 7), years_of_experience=5, phone_number="5556540987"),
    dict(first_name="Megan", last_name="Green", city="San Francisco", degree="MD",
         specialties=_pick(0, 2, 23), years_of_experience=14, phone_number="5553482310"),
    dict(first_name="Joshua", last_name="Walker", city="Columbus", degree="PhD",
         specialties=_pick(4, 9, 18), years_of_experience=9, phone_number="5559873456"),
    dict(first_name="Amanda", last_name="Hall", city="Fort Worth", degree="MSW",
         specialties=_pick(6, 12), years_of_experience=3, phone_number="5554567123"),
]


def seed_records() -> List[AdvocateCreate]:
    """Validated records ready for insertion."""
    return [AdvocateCreate(**record) for record in ADVOCATE_SEED]


def fallback_records() -> List[AdvocateRead]:
    """The dataset as read models, without ids or timestamps."""
    return [
        AdvocateRead(**record.model_dump(exclude={"phone_number"}), phone_number=str(record.phone_digits()))
        for record in seed_records()
    ]
