"""
User Management Module

Client-side access to the platform's user resource collection:
- domain: UserRecord and RequestOptions
- services: UserDirectoryClient (fetch / create / update / delete)
"""
