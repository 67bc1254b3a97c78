"""TypeScript types for GraphQL operations."""
