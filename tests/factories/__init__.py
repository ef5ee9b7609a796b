# Mock factories for domain interfaces
