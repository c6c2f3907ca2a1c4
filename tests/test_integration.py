"""Integration tests for end-to-end workflows."""

from ledgerbook.cli.main import cli


def test_full_workflow(cli_runner, temp_db, fixtures_dir):
    """Test complete workflow: book → account → rules → import → categorize → clear."""
    db_args = ["--db-path", temp_db.database_path]

    # Step 1: Create account book and account
    result = cli_runner.invoke(cli, [*db_args, "book", "create", "Household"])
    assert result.exit_code == 0
    result = cli_runner.invoke(cli, [*db_args, "account", "create", "Household", "Everyday"])
    assert result.exit_code == 0
    account_id = None
    for line in result.output.split("\n"):
        if "ID:" in line:
            # Extract account ID from output like "Created account 'Everyday' (ID: 1)"
            account_id = line.split("ID:")[1].strip().rstrip(")")
            break
    assert account_id is not None

    # Step 2: Add a rule before importing
    result = cli_runner.invoke(cli, [*db_args, "rule", "create", "Household", "coles", "Groceries"])
    assert result.exit_code == 0

    # Step 3: Import, addressing the account by ID
    result = cli_runner.invoke(
        cli,
        [*db_args, "import", str(fixtures_dir / "sample.qif"), "--book", "Household", "--account", account_id],
    )
    assert result.exit_code == 0
    assert "Imported: 4 of 4 transactions" in result.output

    # Step 4: A rule added later is applied to what is still uncategorized
    result = cli_runner.invoke(
        cli, [*db_args, "rule", "create", "Household", "netflix", "Entertainment"]
    )
    assert result.exit_code == 0
    result = cli_runner.invoke(cli, [*db_args, "rule", "apply", "Household"])
    assert result.exit_code == 0
    assert "Updated 1 transaction" in result.output

    result = cli_runner.invoke(cli, [*db_args, "transaction", "categories", "Household"])
    assert result.output.split() == ["Entertainment", "Food", "Groceries", "Income"]

    # Step 5: Monthly history
    result = cli_runner.invoke(cli, [*db_args, "account", "show", "Household", "Everyday"])
    assert result.exit_code == 0
    assert "1,457.50" in result.output
    assert "1,361.51" in result.output

    # Step 6: Clear January and check the running balance restarts from February
    result = cli_runner.invoke(
        cli, [*db_args, "account", "clear", "Household", "Everyday", "--month", "2024-01", "--yes"]
    )
    assert result.exit_code == 0
    assert "Removed 2 transactions" in result.output

    result = cli_runner.invoke(cli, [*db_args, "account", "show", "Household", "Everyday"])
    assert "2024-01" not in result.output
    assert "-95.99" in result.output

    # Step 7: Delete the book
    result = cli_runner.invoke(cli, [*db_args, "book", "delete", "Household", "--yes"])
    assert result.exit_code == 0
    result = cli_runner.invoke(cli, [*db_args, "book", "list"])
    assert "No account books found." in result.output
