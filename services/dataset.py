"""Dataset Service - loads, filters and describes restaurant records."""
import io
import logging
import math
import re

import pandas as pd

from core.exceptions import DataParseError
from core.restaurant import Restaurant
from utils.data_generator import DataGenerator

logger = logging.getLogger(__name__)

ALL = "all"

# Leading number of a cell, trailing text such as "40.75 N" is ignored
NUMBER_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

# Header variants accepted for each field, in order of preference (case-insensitive)
COLUMN_ALIASES = {
    "name": [
        "name", "restaurant_name", "restaurant", "restaurant name",
        "business_name", "business name", "title",
    ],
    "lat": [
        "lat", "latitude", "y", "coord_lat", "lat_coord",
    ],
    "lon": [
        "lon", "lng", "longitude", "x", "coord_lon", "lng_coord", "coord_lng",
    ],
    "cuisine": [
        "cuisine", "type", "category", "food_type", "food type",
        "cuisine_type", "cuisine type",
    ],
    "zone": [
        "zone", "area", "district", "region", "neighborhood", "borough",
    ],
}


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return str(value).strip() == ""


def _pick(row, columns):
    """Return the first non-blank cell among the candidate columns."""
    for column in columns:
        value = row.get(column)
        if not _is_blank(value):
            return str(value).strip()
    return None


def _parse_coordinate(value):
    if value is None:
        return math.nan
    match = NUMBER_PREFIX.match(value)
    if not match:
        return math.nan
    return float(match.group(0))


class DatasetService:
    """Service for turning uploaded data into Restaurant objects."""

    def __init__(self, config):
        self.config = config
        self.data_generator = DataGenerator()

    def _resolve_columns(self, headers):
        """Map each field to the actual headers that can supply it."""
        by_lower = {}
        for header in headers:
            by_lower.setdefault(str(header).strip().lower(), header)
        return {
            field: [by_lower[alias] for alias in aliases if alias in by_lower]
            for field, aliases in COLUMN_ALIASES.items()
        }

    def _read_frame(self, source):
        try:
            return pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
        except pd.errors.EmptyDataError:
            raise DataParseError(
                "No data found in CSV. Please check if the file contains valid restaurant data."
            )
        except pd.errors.ParserError as e:
            raise DataParseError(f"CSV parsing error: {e}") from e

    def _frame_to_restaurants(self, df):
        rows = [
            row for row in df.to_dict(orient="records")
            if not all(_is_blank(v) for v in row.values())
        ]
        if not rows:
            raise DataParseError(
                "No data found in CSV. Please check if the file contains valid restaurant data."
            )

        columns = self._resolve_columns(df.columns)
        restaurants = []
        for index, row in enumerate(rows):
            lat = _parse_coordinate(_pick(row, columns["lat"]))
            lon = _parse_coordinate(_pick(row, columns["lon"]))
            if not (math.isfinite(lat) and math.isfinite(lon)):
                raise DataParseError(
                    f"Invalid coordinates for row {index + 1}: lat={lat}, lon={lon}. "
                    f"Available columns: {', '.join(str(c) for c in df.columns)}"
                )

            restaurants.append(Restaurant(
                id=f"restaurant-{index}",
                name=_pick(row, columns["name"]) or f"Restaurant {index + 1}",
                lat=lat,
                lon=lon,
                cuisine=_pick(row, columns["cuisine"]),
                zone=_pick(row, columns["zone"])
            ))

        logger.info("Parsed %d restaurants", len(restaurants))
        return restaurants

    def parse_csv(self, csv_text):
        """
        Parse CSV text into restaurants.

        Args:
            csv_text: Raw CSV content with a header row

        Returns:
            List of Restaurant objects in file order

        Raises:
            DataParseError: when the bytes are not UTF-8, the text is empty
                or HTML, or a row has no usable coordinates
        """
        if isinstance(csv_text, bytes):
            try:
                csv_text = csv_text.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise DataParseError(
                    "CSV must be UTF-8 encoded. Please re-save the file as UTF-8 and upload it again."
                ) from e
        if "<!DOCTYPE html" in csv_text or "<html" in csv_text:
            raise DataParseError(
                "Received HTML instead of CSV. Please upload a CSV file with restaurant data."
            )
        df = self._read_frame(io.StringIO(csv_text))
        return self._frame_to_restaurants(df)

    def load_csv(self, path):
        """Load restaurants from a local CSV file."""
        logger.info("Loading restaurants from %s", path)
        df = self._read_frame(path)
        return self._frame_to_restaurants(df)

    def load_sample(self):
        """Return the built-in sample restaurants."""
        df = self.data_generator.sample()
        return [
            Restaurant(
                id=row["id"], name=row["name"], lat=float(row["lat"]), lon=float(row["lon"]),
                cuisine=row["cuisine"], zone=row["zone"]
            )
            for row in df.to_dict(orient="records")
        ]

    def load(self, path=None):
        """Load from a CSV path when given, otherwise the sample data."""
        path = path or getattr(self.config, 'DATA_FILE', None)
        if path:
            return self.load_csv(path)
        return self.load_sample()

    @staticmethod
    def filter_restaurants(restaurants, cuisine=ALL, zone=ALL):
        """Keep restaurants matching the cuisine and zone ("all" or None disables a filter)."""
        def matches(selected, value):
            return selected in (None, "", ALL) or value == selected

        return [
            r for r in restaurants
            if matches(cuisine, r.cuisine) and matches(zone, r.zone)
        ]

    @staticmethod
    def get_cuisines(restaurants):
        return sorted({r.cuisine for r in restaurants if r.cuisine})

    @staticmethod
    def get_zones(restaurants):
        return sorted({r.zone for r in restaurants if r.zone})
