"""Small class hierarchies: shapes and calculators."""