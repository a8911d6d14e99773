"""Company and job persistence on top of the SQL builders."""
