"""Pipeline components: analysis, recommendation, prompting, generation, storage."""
