from dishka import Provider as DishkaProvider

from recast.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all recast DI providers. Provides at APP scope unless told otherwise."""

    scope = Scope.APP
