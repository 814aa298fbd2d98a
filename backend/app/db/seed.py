"""
Database seeding for the clinic reference data.

Loads the standard clinic fixture: 10 owners with their pets and visits,
6 vets and 3 specialties. Seeding is idempotent: it only runs against a
database without owners or vets.
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.db.base import Owner, Pet, PetType, Specialty, Vet, Visit
from app.db.session import SessionLocal

logger = logging.getLogger(__name__)

PET_TYPES = ("cat", "dog", "lizard", "snake", "bird", "hamster")

SPECIALTIES = ("radiology", "surgery", "dentistry")

# (first name, last name, specialties)
VETS = (
    ("James", "Carter", ()),
    ("Helen", "Leary", ("radiology",)),
    ("Linda", "Douglas", ("surgery", "dentistry")),
    ("Rafael", "Ortega", ("surgery",)),
    ("Henry", "Stevens", ("radiology",)),
    ("Sharon", "Jenkins", ()),
)

# (first name, last name, address, city, telephone, pets)
# pet: (name, birth date, type, visits); visit: (date, description)
OWNERS = (
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023",
     (("Leo", date(2010, 9, 7), "cat", ()),)),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749",
     (("Basil", date(2012, 8, 6), "hamster", ()),)),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763",
     (("Rosy", date(2011, 4, 17), "dog", ()),
      ("Jewel", date(2010, 3, 7), "dog", ()))),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198",
     (("Iggy", date(2010, 11, 30), "lizard", ()),)),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765",
     (("George", date(2010, 1, 20), "snake", ()),)),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654",
     (("Samantha", date(2012, 9, 4), "cat",
       ((date(2013, 1, 1), "rabies shot"), (date(2013, 1, 4), "spayed"))),
      ("Max", date(2012, 9, 4), "cat",
       ((date(2013, 1, 2), "rabies shot"), (date(2013, 1, 3), "neutered"))))),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387",
     (("Lucky", date(2011, 8, 6), "bird", ()),)),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683",
     (("Mulligan", date(2007, 2, 24), "dog", ()),)),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435",
     (("Freddy", date(2010, 3, 9), "bird", ()),)),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487",
     (("Lucky", date(2010, 6, 24), "dog", ()),
      ("Sly", date(2012, 6, 8), "cat", ()))),
)


def is_database_empty(db: Session) -> bool:
    owners = db.scalar(select(func.count()).select_from(Owner))
    vets = db.scalar(select(func.count()).select_from(Vet))
    return not owners and not vets


def seed_clinic_data(db: Session) -> bool:
    """Insert the clinic fixture into ``db``.

    Returns:
        True when data was inserted, False when the database already had
        owners or vets and was left untouched.
    """
    if not is_database_empty(db):
        logger.debug("Clinic data already present, skipping seed")
        return False

    types = {name: PetType(name=name) for name in PET_TYPES}
    specialties = {name: Specialty(name=name) for name in SPECIALTIES}
    db.add_all(types.values())
    db.add_all(specialties.values())

    for first_name, last_name, names in VETS:
        db.add(
            Vet(
                first_name=first_name,
                last_name=last_name,
                specialties=[specialties[n] for n in names],
            )
        )

    for first_name, last_name, address, city, telephone, pets in OWNERS:
        owner = Owner(
            first_name=first_name,
            last_name=last_name,
            address=address,
            city=city,
            telephone=telephone,
        )
        for pet_name, birth_date, type_name, visits in pets:
            owner.pets.append(
                Pet(
                    name=pet_name,
                    birth_date=birth_date,
                    type=types[type_name],
                    visits=[Visit(visit_date=d, description=text) for d, text in visits],
                )
            )
        db.add(owner)

    db.commit()
    logger.info(
        "Clinic data seeded",
        extra={"context": {"owners": len(OWNERS), "vets": len(VETS)}},
    )
    return True


def ensure_clinic_data() -> None:
    """
    Seed an empty database at startup.

    This function is idempotent - it can be called multiple times safely.
    """
    try:
        with SessionLocal() as db:
            seed_clinic_data(db)
    except Exception as e:
        logger.error(
            "Failed to seed clinic data",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        # Don't raise - app should still start even if seeding fails
