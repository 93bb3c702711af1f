"""External data source integrations.

One module per provider (or a subpackage when a category draws on several):

    datasources/
    ├── geocoding/   ZIP (Zippopotam), free text + reverse (Nominatim), autocomplete (Photon)
    ├── heritage/    Wikipedia nearby pages, Overpass, curated list
    ├── usgs.py      Earthquakes
    ├── ebird.py     Bird sightings
    ├── inaturalist.py  Insect observations
    ├── nps.py       National parks
    ├── pbdb.py      Fossil occurrences
    ├── wttr.py      Current weather
    └── macrostrat.py  Bedrock geology

Adding a new datasource
-----------------------
1. Create ``datasources/{name}.py`` with the API URL and two functions::

       from nature_near.services.http import get_json

       def fetch_something(coord: Coordinate) -> dict[str, Any]:
           return get_json("something", API_URL, params={...})

       def parse_something(data: Any, origin: Coordinate) -> list[Feature]:
           ...

   ``fetch_*`` raises ``ProviderUnavailable`` / ``MalformedResponse`` (via
   ``get_json``); ``parse_*`` raises ``MalformedResponse`` on a schema
   mismatch and returns ``[]`` when the response holds nothing usable.

2. Add a ``ProviderStep`` to the category's chain in
   ``resolution/categories.py``.

3. Add tests in ``tests/test_{name}.py``.
"""
