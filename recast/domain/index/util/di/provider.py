"""DI provider for the index bounded context."""

from dishka import provide

from recast.domain.index.service.index import IndexService
from recast.util.di.base import Provider
from recast.util.di.scope import Scope


class IndexDomainProvider(Provider):
    service = provide(IndexService, scope=Scope.UOW)
