def let_return_source(*, include_trailing_expression: bool = False) -> str:
    maybe_expression = (
        """
        myVar == 10
        """
        if include_trailing_expression
        else ""
    )

    return f"""
    let myVar = anotherVar;
    return 10;
    {maybe_expression}"""
