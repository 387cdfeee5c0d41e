# Schema migration steps, one module per version
