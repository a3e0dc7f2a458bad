"""Great-circle distance, tiered delivery fees and delivery date estimates."""
