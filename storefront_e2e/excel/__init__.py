"""Upload workbook codec: decode, header/record reading, encode."""
