"""Runtime components: transport, response adapters and paging."""
