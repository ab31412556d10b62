from __future__ import annotations

from flowguard.core.node import ValidatorRegistry
from flowguard.models.graph import NodeKind
from flowguard.nodes.api import ApiValidator
from flowguard.nodes.conditional import ConditionalValidator
from flowguard.nodes.form import FormValidator
from flowguard.nodes.terminal import EndValidator, StartValidator

default_registry = ValidatorRegistry()
default_registry.register(StartValidator)
default_registry.register(FormValidator)
default_registry.register(ConditionalValidator)
default_registry.register(ApiValidator)
default_registry.register(EndValidator)
default_registry.ensure_complete(NodeKind)
