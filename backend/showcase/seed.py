"""Example records loaded into the store at startup."""

from showcase.schemas import Banner, Event, Product, Testimonial

BANNERS = [
    Banner(
        id=1,
        title="Middle East’s largest trusted partner",
        subtitle="for Audio Visual & IT Business Solutions",
        imageUrl="hero-placeholder.jpg",  # served from the client directory
        ctaLabel="Discover",
        ctaLink="#",
    ),
]

PRODUCTS = [
    Product(
        id=1,
        name="Sample Printer",
        description="A sample printer product used as a placeholder.",
        imageUrl="product-placeholder.jpg",
        category="Printers",
    ),
]

EVENTS = [
    Event(
        id=1,
        title="GESS Dubai 2023",
        description="Almoe Digital Solutions participates in GESS Dubai, 2023",
        date="2023-11-01",
    ),
    Event(
        id=2,
        title="GITEX Global 2024",
        description="Almoe Digital Solutions participates in GITEX Global Dubai, 2024",
        date="2024-10-15",
    ),
]

TESTIMONIALS = [
    Testimonial(
        id=1,
        name="Marcus Tolledo",
        company="Zayed University",
        message="Almoe Digital Solutions has truly elevated our educational experience.",
    ),
    Testimonial(
        id=2,
        name="Shafeer N",
        company="Athena Education",
        message=(
            "From the moment we engaged with Almoe they demonstrated an impressive "
            "understanding of our specific needs and objectives."
        ),
    ),
]


def seed_records() -> dict:
    """Return fresh plain-dict copies of the seed data, keyed by resource kind."""
    return {
        "banners": [b.model_dump() for b in BANNERS],
        "products": [p.model_dump() for p in PRODUCTS],
        "events": [e.model_dump() for e in EVENTS],
        "testimonials": [t.model_dump() for t in TESTIMONIALS],
        "contact-submissions": [],
    }
