"""
Dashboard components

Each component's service class registers itself here; create_app() builds
one instance per registered class, bound to the app's config.
"""
EXTENSION_KEY = 'param_dashboard'

_services = {}


def register_component(name):
    """Decorator registering a service class under a component name"""
    def decorator(service_class):
        existing = _services.get(name)
        if existing is not None and existing is not service_class:
            raise ValueError(f"Component '{name}' is already registered by {existing.__name__}")
        _services[name] = service_class
        return service_class
    return decorator


def registered_components():
    """Names of registered components, in registration order"""
    return list(_services)


def create_services(config):
    """One service instance per registered component"""
    return {name: service_class(config) for name, service_class in _services.items()}


def get_service(name):
    """Get the service instance bound to the current app"""
    from flask import current_app
    return current_app.extensions[EXTENSION_KEY][name]


__all__ = [
    'EXTENSION_KEY',
    'create_services',
    'get_service',
    'register_component',
    'registered_components',
]
