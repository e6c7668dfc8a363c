"""AWS region catalog.

A fixed set of region identifiers used both to validate configured regions
and to supply the default when none is configured.
"""

from enum import StrEnum

from aws_clients.lib.errors import ConfigurationError


class Region(StrEnum):
    """Known AWS regions. Values are the region identifiers."""

    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    AF_SOUTH_1 = "af-south-1"
    AP_EAST_1 = "ap-east-1"
    AP_SOUTH_1 = "ap-south-1"
    AP_SOUTH_2 = "ap-south-2"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_NORTHEAST_3 = "ap-northeast-3"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_SOUTHEAST_3 = "ap-southeast-3"
    AP_SOUTHEAST_4 = "ap-southeast-4"
    CA_CENTRAL_1 = "ca-central-1"
    CA_WEST_1 = "ca-west-1"
    CN_NORTH_1 = "cn-north-1"
    CN_NORTHWEST_1 = "cn-northwest-1"
    EU_CENTRAL_1 = "eu-central-1"
    EU_CENTRAL_2 = "eu-central-2"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    EU_NORTH_1 = "eu-north-1"
    EU_SOUTH_1 = "eu-south-1"
    EU_SOUTH_2 = "eu-south-2"
    IL_CENTRAL_1 = "il-central-1"
    ME_SOUTH_1 = "me-south-1"
    ME_CENTRAL_1 = "me-central-1"
    SA_EAST_1 = "sa-east-1"
    US_GOV_EAST_1 = "us-gov-east-1"
    US_GOV_WEST_1 = "us-gov-west-1"


DEFAULT_REGION = Region.US_EAST_1

_DESCRIPTIONS: dict[Region, str] = {
    Region.US_EAST_1: "US East (N. Virginia)",
    Region.US_EAST_2: "US East (Ohio)",
    Region.US_WEST_1: "US West (N. California)",
    Region.US_WEST_2: "US West (Oregon)",
    Region.AF_SOUTH_1: "Africa (Cape Town)",
    Region.AP_EAST_1: "Asia Pacific (Hong Kong)",
    Region.AP_SOUTH_1: "Asia Pacific (Mumbai)",
    Region.AP_SOUTH_2: "Asia Pacific (Hyderabad)",
    Region.AP_NORTHEAST_1: "Asia Pacific (Tokyo)",
    Region.AP_NORTHEAST_2: "Asia Pacific (Seoul)",
    Region.AP_NORTHEAST_3: "Asia Pacific (Osaka)",
    Region.AP_SOUTHEAST_1: "Asia Pacific (Singapore)",
    Region.AP_SOUTHEAST_2: "Asia Pacific (Sydney)",
    Region.AP_SOUTHEAST_3: "Asia Pacific (Jakarta)",
    Region.AP_SOUTHEAST_4: "Asia Pacific (Melbourne)",
    Region.CA_CENTRAL_1: "Canada (Central)",
    Region.CA_WEST_1: "Canada West (Calgary)",
    Region.CN_NORTH_1: "China (Beijing)",
    Region.CN_NORTHWEST_1: "China (Ningxia)",
    Region.EU_CENTRAL_1: "EU (Frankfurt)",
    Region.EU_CENTRAL_2: "EU (Zurich)",
    Region.EU_WEST_1: "EU (Ireland)",
    Region.EU_WEST_2: "EU (London)",
    Region.EU_WEST_3: "EU (Paris)",
    Region.EU_NORTH_1: "EU (Stockholm)",
    Region.EU_SOUTH_1: "EU (Milan)",
    Region.EU_SOUTH_2: "EU (Spain)",
    Region.IL_CENTRAL_1: "Israel (Tel Aviv)",
    Region.ME_SOUTH_1: "Middle East (Bahrain)",
    Region.ME_CENTRAL_1: "Middle East (UAE)",
    Region.SA_EAST_1: "South America (Sao Paulo)",
    Region.US_GOV_EAST_1: "AWS GovCloud (US-East)",
    Region.US_GOV_WEST_1: "AWS GovCloud (US-West)",
}


def parse_region(value: str | None) -> Region:
    """Validate a region identifier.

    None or an empty string selects DEFAULT_REGION. Anything not in the
    catalog raises ConfigurationError.
    """
    if value is None or not value.strip():
        return DEFAULT_REGION
    try:
        return Region(value.strip())
    except ValueError:
        raise ConfigurationError(f"Unsupported region: {value!r}") from None


def describe_region(region: Region) -> str:
    """Human-readable name, e.g. 'US West (Oregon)'."""
    return _DESCRIPTIONS[region]


def all_regions() -> list[Region]:
    return list(Region)
