"""
An in-memory stand-in for the bunny.net API.

``FakeClient`` has the same services and methods as ``infra_bunny.lib.client.Client`` but keeps pull zones, storage
zones and video libraries in dicts. Errors can be injected per method with ``FakeAPI.fail_on``.
"""
import copy
import itertools
import uuid
from dataclasses import fields
from typing import Optional

from infra_bunny.lib.client import APIError, Page, models
from infra_bunny.lib.client.pagination import DEFAULT_PER_PAGE, iter_pages, pagination_params

DNS_NOT_POINTING = "The hostname {} is not pointing to our servers. Please update your DNS records."


def not_found(entity: str, id_) -> APIError:
    return APIError(f"{entity} not found", 404, f"https://api.bunny.net/{entity}/{id_}", error_key=f"{entity}.not_found")


def bad_request(message: str, field: Optional[str] = None) -> APIError:
    return APIError(message, 400, "https://api.bunny.net", error_key="validation", field=field)


def _apply(target, opts, renames: Optional[dict] = None) -> None:
    """Copy the set fields of the request ``opts`` onto the API object ``target``"""
    renames = renames or {}
    for f in fields(opts):
        value = getattr(opts, f.name)
        if value is None:
            continue
        name = renames.get(f.name, f.name)
        if hasattr(target, name):
            setattr(target, name, copy.deepcopy(value))


class FakeAPI:
    def __init__(self):
        self.pull_zones: dict[int, models.PullZone] = {}
        self.storage_zones: dict[int, models.StorageZone] = {}
        self.video_libraries: dict[int, models.VideoLibrary] = {}
        self.calls: list[tuple] = []
        self.certificate_attempts = 0
        self.dns_pointing_after: Optional[int] = 0
        """Failed attempts to load a free certificate before the DNS record points to the CDN, None for never"""

        self._ids = itertools.count(1)
        self._failures: dict[str, list[Exception]] = {}

    def next_id(self) -> int:
        return next(self._ids)

    def fail_on(self, method: str, err: Exception, times: int = 1) -> None:
        """Raise ``err`` from the next ``times`` calls of ``method``, e.g. ``pull_zone.update``"""
        self._failures.setdefault(method, []).extend([err] * times)

    def called(self, method: str) -> list[tuple]:
        return [tuple(args) for name, *args in self.calls if name == method]

    def record(self, method: str, *args) -> None:
        self.calls.append((method, *args))

        if pending := self._failures.get(method):
            raise pending.pop(0)


class _Service:
    entity: str
    prefix: str

    def __init__(self, api: FakeAPI):
        self._api = api

    @property
    def _store(self) -> dict:
        raise NotImplementedError

    def _find(self, id_: int):
        try:
            return self._store[id_]
        except KeyError:
            raise not_found(self.entity, id_)

    def get(self, id: int, *args, **kwargs):
        self._api.record(f"{self.prefix}.get", id, *args, *kwargs.values())
        return copy.deepcopy(self._find(id))

    def list(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Page:
        self._api.record(f"{self.prefix}.list", page, per_page)

        params = pagination_params(page, per_page)
        start = (params["page"] - 1) * params["per_page"]
        items = list(self._store.values())

        return Page(
            items=copy.deepcopy(items[start : start + params["per_page"]]),
            current_page=params["page"],
            total_items=len(items),
            has_more_items=start + params["per_page"] < len(items),
        )

    def iter_all(self, per_page: int = DEFAULT_PER_PAGE):
        return iter_pages(self.list, per_page)

    def delete(self, id: int) -> None:
        self._api.record(f"{self.prefix}.delete", id)
        self._find(id)
        del self._store[id]


class FakePullZoneService(_Service):
    entity = "pullzone"
    prefix = "pull_zone"

    @property
    def _store(self) -> dict:
        return self._api.pull_zones

    def add(self, opts: models.PullZoneAddOptions) -> models.PullZone:
        self._api.record("pull_zone.add", opts)

        if any(pz.name == opts.name for pz in self._api.pull_zones.values()):
            raise bad_request("The pull zone name is already taken.", "Name")

        id_ = self._api.next_id()
        pz = models.PullZone(
            id=id_,
            name=opts.name,
            origin_url=opts.origin_url,
            storage_zone_id=opts.storage_zone_id,
            type=opts.type or 0,
            enabled=True,
            cname_domain=f"{opts.name}.b-cdn.net",
            enable_geo_zone_eu=True,
            enable_geo_zone_us=True,
            zone_security_key=f"security-key-{id_}",
            hostnames=[
                models.Hostname(
                    id=self._api.next_id(),
                    value=f"{opts.name}.b-cdn.net",
                    force_ssl=False,
                    is_system_hostname=True,
                    has_certificate=True,
                )
            ],
            edge_rules=[],
        )
        self._api.pull_zones[id_] = pz

        return copy.deepcopy(pz)

    def update(self, id: int, opts: models.PullZoneUpdateOptions) -> models.PullZone:
        self._api.record("pull_zone.update", id, opts)

        pz = self._find(id)
        _apply(
            pz,
            opts,
            {"cache_control_browser_max_age_override": "cache_control_public_max_age_override"},
        )

        return copy.deepcopy(pz)

    def add_or_update_edge_rule(self, pull_zone_id: int, opts: models.AddOrUpdateEdgeRuleOptions) -> None:
        self._api.record("pull_zone.add_or_update_edge_rule", pull_zone_id, opts)

        pz = self._find(pull_zone_id)

        if opts.guid is None:
            edge_rule = models.EdgeRule(guid=str(uuid.uuid4()))
            pz.edge_rules = (pz.edge_rules or []) + [edge_rule]
        else:
            edge_rule = next((er for er in pz.edge_rules or [] if er.guid == opts.guid), None)
            if edge_rule is None:
                raise not_found("edgerule", opts.guid)

        _apply(edge_rule, opts)

    def delete_edge_rule(self, pull_zone_id: int, guid: str) -> None:
        self._api.record("pull_zone.delete_edge_rule", pull_zone_id, guid)

        pz = self._find(pull_zone_id)
        if not any(er.guid == guid for er in pz.edge_rules or []):
            raise not_found("edgerule", guid)

        pz.edge_rules = [er for er in pz.edge_rules if er.guid != guid]

    def _find_hostname(self, pull_zone_id: int, hostname: str) -> models.Hostname:
        entry = next((h for h in self._find(pull_zone_id).hostnames or [] if h.value == hostname), None)
        if entry is None:
            raise not_found("hostname", hostname)
        return entry

    def add_custom_hostname(self, pull_zone_id: int, hostname: str) -> None:
        self._api.record("pull_zone.add_custom_hostname", pull_zone_id, hostname)

        pz = self._find(pull_zone_id)
        if any(h.value == hostname for h in pz.hostnames or []):
            raise bad_request("The hostname is already registered.", "Hostname")

        pz.hostnames = (pz.hostnames or []) + [
            models.Hostname(
                id=self._api.next_id(),
                value=hostname,
                force_ssl=False,
                is_system_hostname=False,
                has_certificate=False,
            )
        ]

    def remove_custom_hostname(self, pull_zone_id: int, hostname: str) -> None:
        self._api.record("pull_zone.remove_custom_hostname", pull_zone_id, hostname)

        pz = self._find(pull_zone_id)
        self._find_hostname(pull_zone_id, hostname)
        pz.hostnames = [h for h in pz.hostnames if h.value != hostname]

    def set_force_ssl(self, pull_zone_id: int, hostname: str, force_ssl: bool) -> None:
        self._api.record("pull_zone.set_force_ssl", pull_zone_id, hostname, force_ssl)

        self._find_hostname(pull_zone_id, hostname).force_ssl = force_ssl

    def load_free_certificate(self, hostname: str) -> None:
        self._api.record("pull_zone.load_free_certificate", hostname)

        self._api.certificate_attempts += 1
        if self._api.dns_pointing_after is None or self._api.certificate_attempts <= self._api.dns_pointing_after:
            raise bad_request(DNS_NOT_POINTING.format(hostname))

        for pz in self._api.pull_zones.values():
            for entry in pz.hostnames or []:
                if entry.value == hostname:
                    entry.has_certificate = True

    def add_custom_certificate(self, pull_zone_id: int, hostname: str, certificate: bytes, key: bytes) -> None:
        self._api.record("pull_zone.add_custom_certificate", pull_zone_id, hostname, certificate, key)

        self._find_hostname(pull_zone_id, hostname).has_certificate = True

    def remove_certificate(self, pull_zone_id: int, hostname: str) -> None:
        self._api.record("pull_zone.remove_certificate", pull_zone_id, hostname)

        self._find_hostname(pull_zone_id, hostname).has_certificate = False


class FakeStorageZoneService(_Service):
    entity = "storagezone"
    prefix = "storage_zone"

    @property
    def _store(self) -> dict:
        return self._api.storage_zones

    def add(self, opts: models.StorageZoneAddOptions) -> models.StorageZone:
        self._api.record("storage_zone.add", opts)

        id_ = self._api.next_id()
        sz = models.StorageZone(
            id=id_,
            user_id="user-1",
            name=opts.name,
            password=f"password-{id_}",
            read_only_password=f"read-only-password-{id_}",
            date_modified="2022-01-01T00:00:00",
            deleted=False,
            storage_used=0,
            files_stored=0,
            region=opts.region,
            replication_regions=list(opts.replication_regions or []),
            origin_url=opts.origin_url,
        )
        self._api.storage_zones[id_] = sz

        return copy.deepcopy(sz)

    def update(self, id: int, opts: models.StorageZoneUpdateOptions) -> None:
        self._api.record("storage_zone.update", id, opts)

        _apply(self._find(id), opts)


class FakeVideoLibraryService(_Service):
    entity = "videolibrary"
    prefix = "video_library"

    @property
    def _store(self) -> dict:
        return self._api.video_libraries

    def add(self, opts: models.VideoLibraryAddOptions) -> models.VideoLibrary:
        self._api.record("video_library.add", opts)

        id_ = self._api.next_id()
        vl = models.VideoLibrary(
            id=id_,
            name=opts.name,
            replication_regions=list(opts.replication_regions or []),
            video_count=0,
            traffic_usage=0,
            storage_usage=0,
            date_created="2022-01-01T00:00:00",
            api_key=f"api-key-{id_}",
            read_only_api_key=f"read-only-api-key-{id_}",
            has_watermark=False,
            pull_zone_id=self._api.next_id(),
            storage_zone_id=self._api.next_id(),
            pull_zone_type=0,
            allowed_referrers=[],
            blocked_referrers=[],
        )
        self._api.video_libraries[id_] = vl

        return copy.deepcopy(vl)

    def get(self, id: int, include_access_key: bool = False) -> models.VideoLibrary:
        self._api.record("video_library.get", id, include_access_key)

        vl = copy.deepcopy(self._find(id))
        vl.api_access_key = f"access-key-{id}" if include_access_key else None

        return vl

    def update(self, id: int, opts: models.VideoLibraryUpdateOptions) -> models.VideoLibrary:
        self._api.record("video_library.update", id, opts)

        vl = self._find(id)
        _apply(vl, opts)

        return copy.deepcopy(vl)


class FakeClient:
    def __init__(self, api: Optional[FakeAPI] = None):
        self.api = api or FakeAPI()
        self.pull_zone = FakePullZoneService(self.api)
        self.storage_zone = FakeStorageZoneService(self.api)
        self.video_library = FakeVideoLibraryService(self.api)
