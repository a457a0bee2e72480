"""Infrastructure adapters: database connections and resource loaders."""
