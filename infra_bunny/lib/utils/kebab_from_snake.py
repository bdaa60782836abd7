def kebab_from_snake(v: str) -> str:
    """Module directories are snake case, e.g. ``edge_scripts``, stacks are named in kebab case, ``edge-scripts``"""
    return v.replace("_", "-")
