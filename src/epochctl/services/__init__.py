"""Service layer: conversion pipeline and the ServiceResult contract."""
