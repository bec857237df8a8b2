"""
Forward-geocodes a query and prints the matches.

Usage:
    python examples/geocode.py <api-key> <query>

- Builds a Params object from the defaults and overrides a few of them.
- Prints the raw JSON body through the debug callback.
- Checks the response status before reading the results.
"""
import sys

from loguru import logger

from ocgeo import Geocode, Params

if len(sys.argv) <= 2:
    print("Usage: geocode.py <api-key> <query>", file=sys.stderr)
    sys.exit(1)

api_key, query = sys.argv[1], sys.argv[2]

params = Params.defaults()
params.language = "en"
params.no_annotations = False

geocoder = Geocode(api_key=api_key, debug_callback=logger.debug)

with geocoder.forward(query, params) as response:
    if response.ok:
        print(f"Got {len(response.results)} results:")

        for i, result in enumerate(response.results, start=1):
            print(
                f"{i:2d}. {result.formatted} (type: {result.components.type}, conf: {result.confidence})"
            )

            if result.bounds is not None and result.bounds.is_valid():
                ne, sw = result.bounds.northeast, result.bounds.southwest
                print(
                    f"\tBounding box: NE=({ne.lat:.7f},{ne.lng:.7f}) SW=({sw.lat:.7f},{sw.lng:.7f})"
                )

            if result.currency is not None:
                print(f"\tCurrency: {result.currency.name} ({result.currency.iso_code})")

            if (symbol := result.get_str("annotations.currency.alternate_symbols.0")) is not None:
                print(f"\tAlternate currency symbol: {symbol}")
    else:
        print(
            f"Request failed with status: {response.status.code} Message: {response.status.message}"
        )
