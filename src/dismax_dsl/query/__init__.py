"""Query targets: dismax parameters, boost arena and restrictions."""
