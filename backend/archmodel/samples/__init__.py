from archmodel.samples import smart_mobility

# name -> zero-argument factory returning a freshly built Workspace
SAMPLE_WORKSPACES = {
    "smart_mobility": smart_mobility.build_workspace,
}

DEFAULT_SAMPLE = "smart_mobility"
