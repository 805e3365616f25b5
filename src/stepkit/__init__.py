"""Deferred, describable test steps for object-mapping client applications.

The `stepkit` package builds acceptance-test steps for applications that
talk to a remote API through an object-mapping client.

Key features:
- immutable steps with a description, a deferred action and well-defined
  terminal outcomes (`succeeded`, `failed`, `timedOut`);
- factories for stubbing network state, caching responses, creating
  objects from named factories, mutating a persistence context and
  presenting screens;
- in-memory reference collaborators and a pytest integration.

Steps are constructed without side effects and executed later by a
sequential runner, so scenarios can be built, inspected and ordered
before any test actually runs.
"""
