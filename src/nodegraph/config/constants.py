DEFAULTS = {
    # Field holding a node's parent list
    "PARENTS_KEY": "parents",
    # Field holding a node's child list
    "CHILDREN_KEY": "children",
}
