"""
Project: GNSS Site Log Builder
Date: 10/17/26 10:02 AM
"""
from typing import Dict, List, Optional, Any, Union
import dataclasses
import logging

logger = logging.getLogger(__name__)

# app
from ..Utils import load_json
from ..core.type_declarations import SiteLogConfigException
from ..core.data_classes import (FormOptions, AntennaOptions, MetSensorOptions,
                                 MoreInformationOptions, AgencyOptions, CountryOptions, GeographyOptions)


class SiteLogConfig:
    """Central configuration manager for site log generation"""

    SECTIONS = ('form', 'antenna', 'metsensor', 'more_information', 'agencies', 'countries', 'geography')

    def __init__(self,
                 custom_config: Optional[Dict[str, Any]] = None,
                 json_file: Union[str, dict] = None):
        """
        Initialize site log configuration

        Args:
            custom_config: Dictionary of custom configuration overrides
            json_file: either a json file path or a json dict or string to load data from
        """
        self.json_file: Union[str, dict] = json_file

        self.form = FormOptions()
        self.antenna = AntennaOptions()
        self.metsensor = MetSensorOptions()
        self.more_information = MoreInformationOptions()
        self.agencies = AgencyOptions()
        self.countries = CountryOptions()
        self.geography = GeographyOptions()

        if json_file:
            self.load_from_json(json_file)

        if custom_config:
            self.apply_custom_config(custom_config)

    def apply_custom_config(self, config: Dict[str, Any]) -> None:
        """Apply custom configuration overrides"""
        for section_name, section_config in config.items():
            if section_name not in self.SECTIONS:
                raise SiteLogConfigException(f'Unknown configuration section {section_name}')

            section = getattr(self, section_name)
            for key, value in section_config.items():
                if not hasattr(section, key):
                    raise SiteLogConfigException(f'Unknown configuration key {section_name}.{key}')
                setattr(section, key, value)

            # run the section conversions again (dicts to agencies, lists to tuples)
            section.__post_init__()

    def validate_config(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        if not self.metsensor.data_sampling_interval:
            issues.append("Met sensor sampling interval cannot be empty")

        if not self.metsensor.effective_dates:
            issues.append("Met sensor effective dates cannot be empty")

        if not self.antenna.no_radome:
            issues.append("Radome placeholder for antennas without a radome cannot be empty")

        for point in self.countries.reference_points:
            if len(point) != 3:
                issues.append(f"Country reference point {point} must be (name, lat, lon)")
            elif not -90 <= point[1] <= 90 or not -180 <= point[2] <= 360:
                issues.append(f"Country reference point {point[0]} has invalid coordinates")

        return issues

    def load_from_json(self, _json: Union[dict, str] = None):
        # load sections from json file, missing sections keep their defaults
        try:
            data = load_json(_json)
        except (ValueError, OSError) as e:
            raise SiteLogConfigException(f'Unable to load configuration: {e}') from e

        logger.debug('Loading site log configuration from json')
        self.apply_custom_config({key: value for key, value in data.items() if key in self.SECTIONS})

    def to_json(self) -> Dict[str, Any]:
        return {section: dataclasses.asdict(getattr(self, section)) for section in self.SECTIONS}
