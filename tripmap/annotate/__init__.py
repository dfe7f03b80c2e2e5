"""Map annotation contracts and their consumers.

Modules:
    base             — MapAnnotation protocol
    titles           — Continuation pin titles from a template
    selection        — Recover the trip behind a selected pin
    geojson_writer   — Write annotations as GeoJSON
"""
