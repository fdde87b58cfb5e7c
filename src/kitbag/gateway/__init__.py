"""Gateways to the outside world: git, the filesystem and the clock.

Each gateway is an ABC with a Real implementation here and a Fake under
tests/fakes/.
"""
