"""TaskMaster: employees, tasks and the assignments between them."""
