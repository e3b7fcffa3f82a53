"""Testing utilities for HydraTree consumers."""

from .fixtures import OperationSpy, build_sample_tree, settle

__all__ = ['OperationSpy', 'build_sample_tree', 'settle']
