# File: bobo_site/db/seed.py

"""
Projects inserted into an empty database on first start.
"""

_CREW = "Matti Kuusniemi (DIT)"

SHOWCASE_PROJECTS = [
    {
        "title": "Tuntematon Sotilas",
        "year": 2017,
        "poster_url": "https://image.tmdb.org/t/p/w500/vOipe2myi26UNfY1ufV8Ywlwqbe.jpg",
        "dop": "Mika Orasmaa",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=4dAaLbsQSzI",
        "production_company": "Elokuvaosakeyhtiö Suomi 2017",
    },
    {
        "title": "Hevi Reissu",
        "year": 2018,
        "poster_url": "https://image.tmdb.org/t/p/w500/xJnbMTrJ2fl1AXAKx34qu8yMDnv.jpg",
        "dop": "Tuomo Hutri",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=VZjGnwMPGXg",
        "production_company": "Making Movies",
    },
    {
        "title": "Laugh or Die",
        "year": 2018,
        "poster_url": "https://image.tmdb.org/t/p/w500/7KdmKMcMwrMXvPXoK0N7mM9sNNw.jpg",
        "dop": "Rauno Ronkainen",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=4b7gF04CpHQ",
        "production_company": "Helsinki-filmi",
    },
    {
        "title": "Oma maa",
        "year": 2018,
        "poster_url": "https://image.tmdb.org/t/p/w500/7RaFtzxtaiO21vyVkGfxlbPVPV0.jpg",
        "dop": "Rauno Ronkainen",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=G_2T6l_Rnx0",
        "production_company": "Elokuvaosakeyhtiö Aamu",
    },
    {
        "title": "Veljeni Vartija",
        "year": 2018,
        "poster_url": "https://image.tmdb.org/t/p/w500/bQS43HSLZzMjZkcHJz4fGc7fNdz.jpg",
        "dop": "Tuomo Hutri",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=cMTAUr3Nm6I",
        "production_company": "Solar Films",
    },
    {
        "title": "Tuntematon mestari",
        "year": 2018,
        "poster_url": "https://image.tmdb.org/t/p/w500/8PWFBT8K8YnFtyqaAM3GbdzYoMV.jpg",
        "dop": "Peter Flinckenberg",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=_jBLyJQHR3Q",
        "production_company": "Inland Film Company",
    },
    {
        "title": "Ihmisen osa",
        "year": 2018,
        "poster_url": "https://image.tmdb.org/t/p/w500/iLmYX6gK3rXhNl8TWYjrCxsUKlx.jpg",
        "dop": "Pietari Peltola",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=eFynkQl9Gek",
        "production_company": "Bufo",
    },
    {
        "title": "Joulumaa",
        "year": 2017,
        "poster_url": "https://image.tmdb.org/t/p/w500/ueAXbqFzSmqqJ1l4PxRkiKxLNVH.jpg",
        "dop": "Hannu-Pekka Vitikainen",
        "bobo_crew": _CREW,
        "trailer_url": "https://www.youtube.com/watch?v=E3A3Q1PC7Ok",
        "production_company": "Solar Films",
    },
]
