import logging
from abc import ABC, abstractmethod
from typing import Optional

from pulumi import ResourceOptions
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    Resource,
    ResourceProvider,
    UpdateResult,
)

from infra_bunny.lib.client import Client
from .diagnostics import Diagnostics
from .resource_data import ResourceData
from .schema import Schema
from .settings import ProviderSettings

logger = logging.getLogger(__name__)


class BunnyResourceProvider(ResourceProvider, ABC):
    """
    Base class of the dynamic Pulumi providers for bunny.net resources.

    Pulumi dynamic providers work just like Terraform providers - except they're written in Python. A subclass
    declares the ``schema`` of its resource and implements the ``*_resource`` operations against a ``ResourceData``.
    This class translates between the Pulumi provider protocol and those operations:

    - ``check`` applies the schema's defaults and validates the inputs,
    - ``diff`` runs ``customize_diff`` (which raises on forbidden changes) and compares state and inputs,
    - ``create``, ``read``, ``update`` and ``delete`` run the operation and raise a ``ProviderError`` for error
      diagnostics.

    A creation that fails after the remote object was added still returns the id and the state confirmed so far, so
    the next update retries configuring it instead of creating a duplicate. The errors are logged.

    Dynamic providers cannot access the Pulumi runtime, and anything they hold is serialized into the statefile, so
    the API client is built from ``ProviderSettings`` on every call rather than stored.
    """

    schema: Schema
    """Fields of the resource"""

    entity: str
    """Human readable name of the resource kind, used in log messages"""

    def __init__(self, settings: ProviderSettings):
        super().__init__()
        self.settings = settings

    @abstractmethod
    def create_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        """Create the remote object, ``d.id`` must be set once it exists"""

    @abstractmethod
    def read_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        pass

    @abstractmethod
    def update_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        pass

    @abstractmethod
    def delete_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        pass

    def validate(self, inputs: dict) -> list[tuple[str, str]]:
        """Resource specific input validation on top of the schema's

        :return: A list of ``(field, reason)`` tuples
        """
        return []

    def customize_diff(self, olds: dict, news: dict) -> None:
        """Reject changes to an existing resource that are not allowed, by raising ``ImmutableFieldError``"""

    def _log_warnings(self, diags: Diagnostics) -> None:
        for diag in diags.warnings():
            logger.warning("%s: %s", self.entity, diag)

    def check(self, _olds, news):
        inputs = self.schema.apply_defaults(news)
        failures = self.schema.validate(inputs) + self.validate(inputs)

        return CheckResult(inputs, [CheckFailure(key, reason) for key, reason in failures])

    def diff(self, _id, _olds, _news):
        self.customize_diff(_olds, _news)

        changes, replaces = self.schema.diff(_olds, _news)
        logger.debug("%s %s: changed %s, replacing for %s", self.entity, _id, changes, replaces)

        return DiffResult(changes=bool(changes), replaces=replaces, delete_before_replace=True)

    def create(self, props):
        d = ResourceData(self.schema, config=props)

        diags = self.create_resource(self.settings.client(), d)
        self._log_warnings(diags)

        if diags.has_error():
            if not d.id:
                diags.raise_for_errors()

            d.partial(True)
            for diag in diags.errors():
                logger.error("%s %s was created but not fully configured: %s", self.entity, d.id, diag)

        return CreateResult(d.id, d.state())

    def read(self, id_, props):
        d = ResourceData(self.schema, state=props, id_=id_)

        diags = self.read_resource(self.settings.client(), d)
        self._log_warnings(diags)
        diags.raise_for_errors()

        return ReadResult(d.id, d.state())

    def update(self, _id, _olds, _news):
        d = ResourceData(self.schema, state=_olds, config=_news, id_=_id)

        diags = self.update_resource(self.settings.client(), d)
        self._log_warnings(diags)
        diags.raise_for_errors()

        return UpdateResult(d.state())

    def delete(self, _id, _props):
        d = ResourceData(self.schema, state=_props, id_=_id)

        diags = self.delete_resource(self.settings.client(), d)
        self._log_warnings(diags)
        diags.raise_for_errors()


class BunnyResource(Resource):
    """
    Base class of the bunny.net dynamic resources.

    Every schema field is registered as an output of the resource, sensitive fields as secret outputs.
    """

    def __init__(
        self,
        provider: BunnyResourceProvider,
        resource_name: str,
        props: dict,
        opts: Optional[ResourceOptions] = None,
    ):
        schema = provider.schema

        if unknown := set(props) - set(schema):
            raise TypeError(f"unknown properties {sorted(unknown)} for `{provider.entity}`")

        super().__init__(
            provider,
            resource_name,
            {key: props.get(key) for key in schema},
            ResourceOptions.merge(opts, ResourceOptions(additional_secret_outputs=schema.sensitive_keys())),
        )
