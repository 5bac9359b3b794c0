"""Property-based testing module for fpkit.

This module contains property-based tests using Hypothesis to verify
the functor, monad and validation laws of the Either combinators.
"""
