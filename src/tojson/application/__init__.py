"""Application-layer use-cases, ports and option objects."""
