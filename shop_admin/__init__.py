"""shop-admin: administrative user management for the storefront."""
