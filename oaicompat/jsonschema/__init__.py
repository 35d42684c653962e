"""JSON schema definitions, schema generation from Python types, and validation."""