# Core package: configuration, logging, errors and validation helpers
