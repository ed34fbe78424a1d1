"""Sample hospitals around New York City, used for seeding."""

from __future__ import annotations

from .entities import Hospital, OperatingHours
from .enums import HospitalType

_ROUND_THE_CLOCK = OperatingHours.every_day("24/7")


def sample_hospitals() -> list[Hospital]:
    """Return fresh ``Hospital`` entities (no ids) for the five demo sites."""
    return [
        Hospital(
            name="City General Hospital",
            address="123 Main St, Downtown",
            phone="+1-555-0101",
            email="info@citygeneral.com",
            website="https://citygeneral.com",
            latitude=40.7128,
            longitude=-74.0060,
            type=HospitalType.GENERAL.value,
            services=["Emergency", "Surgery", "Cardiology", "Pediatrics"],
            rating=4.2,
            is_emergency=True,
            operating_hours=_ROUND_THE_CLOCK,
        ),
        Hospital(
            name="St. Mary's Medical Center",
            address="456 Oak Ave, Midtown",
            phone="+1-555-0102",
            email="contact@stmarys.org",
            website="https://stmarys.org",
            latitude=40.7589,
            longitude=-73.9851,
            type=HospitalType.GENERAL.value,
            services=["Emergency", "Maternity", "Oncology", "Orthopedics"],
            rating=4.5,
            is_emergency=True,
            operating_hours=_ROUND_THE_CLOCK,
        ),
        Hospital(
            name="Riverside Clinic",
            address="789 River Rd, Riverside",
            phone="+1-555-0103",
            email="appointments@riverside.com",
            latitude=40.7282,
            longitude=-74.0776,
            type=HospitalType.CLINIC.value,
            services=["General Practice", "Vaccinations", "Health Checkups"],
            rating=4.0,
            is_emergency=False,
            operating_hours=OperatingHours(
                monday="8:00 AM - 6:00 PM",
                tuesday="8:00 AM - 6:00 PM",
                wednesday="8:00 AM - 6:00 PM",
                thursday="8:00 AM - 6:00 PM",
                friday="8:00 AM - 6:00 PM",
                saturday="9:00 AM - 2:00 PM",
                sunday="Closed",
            ),
        ),
        Hospital(
            name="Heart Specialty Center",
            address="321 Cardiac Way, Medical District",
            phone="+1-555-0104",
            email="info@heartcenter.com",
            website="https://heartcenter.com",
            latitude=40.7505,
            longitude=-73.9934,
            type=HospitalType.SPECIALTY.value,
            services=["Cardiology", "Cardiac Surgery", "Heart Transplant"],
            rating=4.8,
            is_emergency=False,
            operating_hours=OperatingHours(
                monday="7:00 AM - 7:00 PM",
                tuesday="7:00 AM - 7:00 PM",
                wednesday="7:00 AM - 7:00 PM",
                thursday="7:00 AM - 7:00 PM",
                friday="7:00 AM - 7:00 PM",
                saturday="8:00 AM - 4:00 PM",
                sunday="Closed",
            ),
        ),
        Hospital(
            name="Emergency Care Plus",
            address="555 Quick St, Emergency District",
            phone="+1-555-0105",
            latitude=40.7411,
            longitude=-74.0023,
            type=HospitalType.EMERGENCY.value,
            services=["Emergency Care", "Trauma", "Urgent Care"],
            rating=4.1,
            is_emergency=True,
            operating_hours=_ROUND_THE_CLOCK,
        ),
    ]
