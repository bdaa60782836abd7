from .client import Client, BASE_URL, DEFAULT_USER_AGENT
from .errors import API_ERRORS, BunnyClientError, AuthenticationError, HTTPError, APIError
from .pagination import DEFAULT_PAGE, DEFAULT_PER_PAGE
from .models import (
    AddOrUpdateEdgeRuleOptions,
    EdgeRule,
    EdgeRuleTrigger,
    Hostname,
    Page,
    PullZone,
    PullZoneAddOptions,
    PullZoneUpdateOptions,
    StorageZone,
    StorageZoneAddOptions,
    StorageZoneUpdateOptions,
    VideoLibrary,
    VideoLibraryAddOptions,
    VideoLibraryUpdateOptions,
)
from . import models
