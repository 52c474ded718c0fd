"""ArtVault storefront: catalog, cart and filter core for the shop widget."""
