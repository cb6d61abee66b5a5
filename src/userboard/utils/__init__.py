"""Cross-cutting helpers: routing, error handling, uploads and passwords."""
