"""Payment storage and business rules."""