"""Shared values for tests."""

KEYSTORE_SECRET = "ks-s3cr3t-value"
TRUSTSTORE_SECRET = "ts-s3cr3t-value"
