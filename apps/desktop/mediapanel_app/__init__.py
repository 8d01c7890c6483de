"""MediaPanel desktop app: CLI, Qt toolkit adapter and preview window."""
