# globe_graph/cities.py
"""Reference data: the seven cities of the demo drawing."""

from typing import List, NamedTuple


class City(NamedTuple):
    name: str
    lat: float
    lng: float


REFERENCE_CITIES: List[City] = [
    City("Bordeax", 44, 0),
    City("Bangkok", 13, 100),
    City("Bombay", 19, 72),
    City("Beijing", 39, 116),
    City("Berlin", 52, 13),
    City("Brisbane", -27, 153),
    City("Santiago", -33, -70),
]
