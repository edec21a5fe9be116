"""
Use Cases

Organized into domain folders:
- apartments/: Apartment listings
- service_requests/: Submitting and progressing service requests
- payments/: Settling and listing payments
- users/: User management
- locations/: Neighbourhood map
- auth/: Sign-in and current context
- dashboard/: Manager and tenant summaries
- data/: Role-scoped snapshot of every collection

Import from subdirectories.
"""
