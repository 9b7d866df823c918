"""Core engine: calendar mapping, hierarchy trees and dashboard metrics."""
