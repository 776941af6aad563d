"""Namespace for a public gateway; it holds no modules."""