"""Select field cell codec: option registries, cell decoding and changesets."""
