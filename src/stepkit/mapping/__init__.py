"""In-memory collaborators of the object-mapping client.

These classes mirror the shared state that acceptance tests stub:
request methods, routes, the operation queue, the HTTP client with its
reachability status, and the response cache, all aggregated by an
`ObjectManager`.
"""

from .cache import CachedResponse, ResponseCache, absolute_url
from .client import REACHABILITY_DID_CHANGE, HTTPClient, OperationQueue, ReachabilityStatus
from .manager import ObjectManager
from .methods import RequestMethod
from .routing import Route, RouteSet

__all__ = (
    'REACHABILITY_DID_CHANGE',
    'CachedResponse',
    'HTTPClient',
    'ObjectManager',
    'OperationQueue',
    'ReachabilityStatus',
    'RequestMethod',
    'ResponseCache',
    'Route',
    'RouteSet',
    'absolute_url',
)
