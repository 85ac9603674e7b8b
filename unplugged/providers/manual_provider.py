"""
Manual weather provider.

Serves a fixed, caller-supplied observation. Used for manual input from
the command line and for rendering without network access.
"""

from datetime import datetime
from .base import DataProvider, DisplayData
from ..weather import WeatherDescription, WeatherObservation


# Starting values for manual input
DEFAULT_OBSERVATION = WeatherObservation(
    temperature=20,
    precipitation_probability=0.3,
    precipitation_intensity=2,
    wind_speed=15,
    wind_direction=180,
    cloud_cover=40,
    humidity=60,
    uv_index=5,
    description=WeatherDescription.SCATTERED_CLOUDS,
)


class ManualWeatherProvider(DataProvider):
    """
    Provider returning the observation it was constructed with.

    No caching is needed since nothing is fetched.
    """

    def __init__(self, observation: WeatherObservation = DEFAULT_OBSERVATION,
                 location: str = "Manual input"):
        """
        Initialize manual provider.

        Args:
            observation: Observation to serve (default: DEFAULT_OBSERVATION)
            location: Label reported as the location
        """
        super().__init__()
        self.observation = observation
        self.location = location

    def fetch_data(self) -> DisplayData:
        return DisplayData(
            timestamp=datetime.now(),
            content={
                "type": "weather",
                "location": self.location,
                "observation": self.observation,
            },
            metadata={
                "source": "manual",
            }
        )
